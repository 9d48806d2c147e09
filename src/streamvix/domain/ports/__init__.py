from .catalog import CatalogPort
from .extractor import PageExtractorPort
from .tmdb import MetadataResolverPort

__all__ = [
    "CatalogPort",
    "MetadataResolverPort",
    "PageExtractorPort",
]
