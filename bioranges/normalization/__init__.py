from bioranges.normalization.base import BaseRowNormalizer
from bioranges.normalization.builder import RowNormalizer, build_entity
from bioranges.normalization.models import BiomarkerEntity, RawRow

__all__ = ["BaseRowNormalizer", "BiomarkerEntity", "RawRow", "RowNormalizer", "build_entity"]
