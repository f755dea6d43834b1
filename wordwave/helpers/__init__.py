from .cloud import weigh
