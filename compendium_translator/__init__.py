"""
Compendium Translator: batch translation of document collections through LLM providers
"""
__version__ = "1.0.0"
