from fridai.services.knowledge import FaqKnowledgeBase, KnowledgeAnswerer
from fridai.services.recognizer import KeywordRecognizer, Recognizer
from fridai.services.speech import SpeechMarkupGenerator, SsmlGenerator
from fridai.services.state_store import MemoryStateStore, StateStore

__all__ = [
    "FaqKnowledgeBase",
    "KnowledgeAnswerer",
    "KeywordRecognizer",
    "Recognizer",
    "SpeechMarkupGenerator",
    "SsmlGenerator",
    "MemoryStateStore",
    "StateStore",
]
