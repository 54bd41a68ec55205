from polspell.nlp.adapter import MorphologicalProvider, Reading, Stemmer, TokenReadings
from polspell.nlp.lexicon import LexiconStemmer
from polspell.nlp.polish import SpacyPolishStemmer, load_polish_stemmer
from polspell.nlp.tagger import DualCaseTagger

__all__ = [
    "MorphologicalProvider",
    "Reading",
    "Stemmer",
    "TokenReadings",
    "LexiconStemmer",
    "SpacyPolishStemmer",
    "load_polish_stemmer",
    "DualCaseTagger",
]
