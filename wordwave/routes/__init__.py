from .errors import error_middleware
from .words import WordsRouter
