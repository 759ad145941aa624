"""
Adapters that plug the splitter into third-party document pipelines.
"""

from .langchain import SentenceTextSplitter

__all__ = ["SentenceTextSplitter"]
