from argflags.parsing.tokenizer import ClassifiedToken, FlagTokenizer, TokenRole, parse_flags

__all__ = ['ClassifiedToken', 'FlagTokenizer', 'TokenRole', 'parse_flags']
