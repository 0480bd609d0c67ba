from medisummarize.ai.client_base import BaseAIClient
from medisummarize.ai.factory import AIClientFactory
from medisummarize.ai.report_chat import ReportChat
from medisummarize.ai.summarizer import ReportSummarizer

__all__ = ["AIClientFactory", "BaseAIClient", "ReportChat", "ReportSummarizer"]
