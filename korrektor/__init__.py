"""
korrektor - normalization tools for Uzbek texts

Sorting by Uzbek collation order, numerals to words, transliteration between
the Latin and Cyrillic alphabets, orthographic corrections and spelling
suggestions.
"""
