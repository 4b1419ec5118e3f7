"""
Number Speller — cardinal numbers spelled out in words, per locale.

Architecture: exact decimal digits → magnitude groups → grammar rendering → text
Grammars:    en_GB, en_US, es_ES (thousands grouping) · zh_CN, zh_TW (myriad grouping)
"""

__version__ = "1.0.0"
