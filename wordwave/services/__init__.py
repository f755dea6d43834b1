from .memory import MemoryStore
from .mongo import MongoStore
from .store import DocumentStore, StoreError, StoreUnavailable
from .words import DEFAULT_TRENDING_LIMIT, MAX_TRENDING_LIMIT, WordCounter, normalize
