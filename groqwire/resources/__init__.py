"""Resource wrappers grouped the way the API groups its routes."""

from .audio import Audio
from .batches import Batches
from .chat import Chat
from .embeddings import Embeddings
from .files import Files
from .models import Models

__all__ = ["Audio", "Batches", "Chat", "Embeddings", "Files", "Models"]
