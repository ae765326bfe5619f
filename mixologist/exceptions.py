class MixologistError(Exception):
    """Base exception for Mixologist errors"""
    pass

class SourceUnavailableError(MixologistError):
    """A recipe source could not be reached or returned an unusable payload"""
    pass

class DatasetError(MixologistError):
    """The bundled cocktail dataset is missing or malformed"""
    pass

class GenerationError(MixologistError):
    """Generative provider failed to produce a usable result"""
    pass

class FavoritesStoreError(MixologistError):
    """Favorites storage errors"""
    pass
