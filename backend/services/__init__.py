"""Services for LearnSmart PDF Summarizer."""
from .llm_client import LLMClient, LLMResponse
from .summarizer import SummarizationService
from .pdf_extractor import PdfExtractor
from .summary_client import SummaryApiClient
from .summary_session import SummarySession, SessionState, SessionSnapshot

__all__ = ['LLMClient', 'LLMResponse', 'SummarizationService', 'PdfExtractor', 'SummaryApiClient', 'SummarySession', 'SessionState', 'SessionSnapshot']
