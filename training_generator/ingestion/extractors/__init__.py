from training_generator.ingestion.extractors.base import BaseContentExtractor
from training_generator.ingestion.extractors.csv_adapter import CsvAdapter
from training_generator.ingestion.extractors.excel_adapter import ExcelAdapter
from training_generator.ingestion.extractors.image_adapter import ImageAdapter
from training_generator.ingestion.extractors.text_adapter import TextAdapter
from training_generator.ingestion.extractors.video_adapter import VideoAdapter

__all__ = [
    "BaseContentExtractor",
    "CsvAdapter",
    "ExcelAdapter",
    "ImageAdapter",
    "TextAdapter",
    "VideoAdapter",
]
