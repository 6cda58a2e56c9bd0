"""
Record extractors for the case import pipeline.

One extractor per source format, selected by the format detector. Each
reads the raw content of the upload and turns it into candidate records;
validation happens later, uniformly for both formats.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Sequence, Type

from .field_normalizer import normalize_delimited_line, normalize_tabular_row
from .models import CandidateRecord, SourceFormat
from .readers import read_pdf_text, read_sheet_rows


class RecordExtractor(ABC):
    """Interfaccia comune degli estrattori"""

    @abstractmethod
    def read(self, content: bytes) -> Any:
        """Legge il contenuto grezzo dal file caricato"""
        pass

    @abstractmethod
    def extract(self, raw_input: Any) -> List[CandidateRecord]:
        """Trasforma il contenuto grezzo in record candidati, nell'ordine del file"""
        pass

    def extract_from_bytes(self, content: bytes) -> List[CandidateRecord]:
        return self.extract(self.read(content))


class DelimitedTextExtractor(RecordExtractor):
    """
    Estrattore per il testo estratto da un PDF.

    Una riga per processo nel formato NUMERO|VARA|PARTES|TIPO_PERICIA|PRAZOS|STATUS.
    Le righe vuote e quelle con meno di cinque campi non fanno parte del lotto.
    """

    def read(self, content: bytes) -> str:
        return read_pdf_text(content)

    def extract(self, raw_input: str) -> List[CandidateRecord]:
        records = []
        for line in raw_input.split("\n"):
            if not line.strip():
                continue
            record = normalize_delimited_line(line)
            if record is not None:
                records.append(record)
        return records


class TabularExtractor(RecordExtractor):
    """Estrattore per il primo foglio di una cartella di lavoro: un record per riga"""

    def read(self, content: bytes) -> List[Dict[str, Any]]:
        return read_sheet_rows(content)

    def extract(self, raw_input: Sequence[Mapping[str, Any]]) -> List[CandidateRecord]:
        return [normalize_tabular_row(row) for row in raw_input]


EXTRACTORS: Dict[SourceFormat, Type[RecordExtractor]] = {
    SourceFormat.DELIMITED_TEXT: DelimitedTextExtractor,
    SourceFormat.TABULAR: TabularExtractor,
}


def get_extractor(source_format: SourceFormat) -> RecordExtractor:
    """Restituisce l'estrattore per il formato; UNSUPPORTED non ha estrattore"""
    extractor_class = EXTRACTORS.get(source_format)
    if extractor_class is None:
        raise ValueError(f"No extractor for format: {source_format.value}")
    return extractor_class()
