#!/usr/bin/env python3
"""
Morse Code Translator
Converts text to Morse code and Morse code back to text using a fixed table
"""

from types import MappingProxyType

# Morse code mapping, listed in the order it is shown to the user
TRANSLATIONS = MappingProxyType({
    'A': '.-', 'B': '-...', 'C': '-.-.', 'D': '-..', 'E': '.', 'F': '..-.',
    'G': '--.', 'H': '....', 'I': '..', 'J': '.---', 'K': '-.-', 'L': '.-..',
    'M': '--', 'N': '-.', 'O': '---', 'P': '.--.', 'Q': '--.-', 'R': '.-.',
    'S': '...', 'T': '-', 'U': '..-', 'V': '...-', 'W': '.--', 'X': '-..-',
    'Y': '-.--', 'Z': '--..',
    '1': '.----', '2': '..---', '3': '...--', '4': '....-', '5': '.....',
    '6': '-....', '7': '--...', '8': '---..', '9': '----.', '0': '-----',
    '.': '.-.-.-', ',': '--..--', '?': '..--..'
})

WORD_SEPARATOR = '/'  # Morse token between words
PLACEHOLDER = '#'  # Stands in for groups that do not decode


def _build_reverse(table):
    """Map each code back to the first character that uses it"""
    reverse = {}
    for char, code in table.items():
        reverse.setdefault(code, char)
    return MappingProxyType(reverse)


# Reverse Morse code mapping (morse -> character)
MORSE_TO_CHAR = _build_reverse(TRANSLATIONS)


def lookup_code(char):
    """Return the Morse code for a character, or None"""
    return TRANSLATIONS.get(char)


def lookup_char(code):
    """Return the character for a Morse code group, or None"""
    return MORSE_TO_CHAR.get(code)


def iter_symbols():
    """Yield (character, code) pairs in table order"""
    return iter(TRANSLATIONS.items())


def text_to_morse(text):
    """
    Convert text to Morse code.

    Every mapped character becomes its code followed by a space, a literal
    space in the input becomes ' / ' and anything else is copied through
    uppercased.
    """
    morse = []
    for char in text:
        # Spaces are checked on the original character, not the folded one
        if char == ' ':
            morse.append(' ' + WORD_SEPARATOR + ' ')
            continue

        upper = char.upper()
        code = lookup_code(upper)
        if code is not None:
            morse.append(code + ' ')
        else:
            morse.append(upper)
    return ''.join(morse)


def morse_to_text(morse_code):
    """
    Convert Morse code to text.

    Groups are split on every single space, so doubled spaces produce empty
    groups; those and any unknown group come out as PLACEHOLDER.
    """
    text = []
    for group in morse_code.split(' '):
        if group == WORD_SEPARATOR:
            text.append(' ')
            continue

        char = lookup_char(group)
        text.append(char if char is not None else PLACEHOLDER)
    return ''.join(text)


def count_unmapped(text):
    """Count characters text_to_morse passes through untranslated"""
    return sum(1 for char in text
               if char != ' ' and lookup_code(char.upper()) is None)


def count_unknown_groups(morse_code):
    """Count groups morse_to_text replaces with PLACEHOLDER"""
    return sum(1 for group in morse_code.split(' ')
               if group != WORD_SEPARATOR and lookup_char(group) is None)


def list_translations():
    """Return one 'character | code' line per table entry"""
    return [f"{char} | {code}" for char, code in iter_symbols()]
