from journal_capture.composition.aggregator import ContentAggregator
from journal_capture.composition.assembler import DraftAssembler
from journal_capture.composition.models import CompositionDraft, EntryImage
from journal_capture.composition.type_resolver import TypeResolver

__all__ = ["CompositionDraft", "ContentAggregator", "DraftAssembler", "EntryImage", "TypeResolver"]
