"""Wire encoders for query strings and multipart bodies."""

from .querystring import stringify
from .form import FileUpload, encode_form, to_file_upload

__all__ = ["stringify", "FileUpload", "encode_form", "to_file_upload"]
