from .text_data import TextData, CHAR_SET_FILENAME

__all__ = ["TextData", "CHAR_SET_FILENAME"]
