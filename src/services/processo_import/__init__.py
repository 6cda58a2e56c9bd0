"""
Case import pipeline: PDF / spreadsheet upload to persisted case records.
"""

from .models import CandidateRecord, ImportOutcome, SourceFormat
from .format_detector import detect_format
from .extractors import DelimitedTextExtractor, TabularExtractor, get_extractor
from .batch_committer import BatchCommitter
