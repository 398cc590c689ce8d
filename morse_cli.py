#!/usr/bin/env python3
"""
Morse Code Translator console application
Translates one line of text to Morse code or Morse code to text
"""

import sys

from morse_config import load_config
from morse_exceptions import ConfigurationError, UsageError
from morse_logging import get_logger, setup_logging
from morse_translator import (
    count_unknown_groups,
    count_unmapped,
    list_translations,
    morse_to_text,
    text_to_morse,
)

logger = get_logger(__name__)

ARGUMENTS = (
    '"m2t" (or "decode") - Morse code to text.',
    '"t2m" (or "encode") - Text to Morse code.',
    '"help" - How to use the application.',
    '"translations" (or "list") - List of translatable characters.',
)

HELP_TEXT = (
    ">    Morse code groups should be separated by a space.\n\n"
    ">    Short should be the period key (.) and long should be a hyphen (-).\n\n"
    ">    / - Forward slash should be used to separate words.\n\n"
    '>    Example: ".... . .-.. .-.. --- / .-- --- .-. .-.. -.." is "HELLO WORLD".'
)


class Console:
    """Reads single lines from the user and prints responses"""

    def __init__(self, prompt="> ", reader=None, writer=None):
        self.prompt = prompt
        self._reader = reader
        self._writer = writer

    def read_line(self):
        """Read one line, treating end of input as an empty line"""
        reader = self._reader or input
        try:
            return reader(self.prompt)
        except EOFError:
            return ''

    def write_line(self, text=''):
        writer = self._writer or print
        writer(text)


def usage_message(header):
    return '\n'.join((header,) + ARGUMENTS)


def run_text_to_morse(console):
    """Ask for text and print its Morse code"""
    console.write_line("Enter the text to be translated.")
    text = console.read_line()

    translation = text_to_morse(text)
    logger.debug(f"Encoded {len(text)} characters, "
                 f"{count_unmapped(text)} passed through untranslated")

    console.write_line(f"Text: {text}")
    console.write_line(f"Morse code: {translation}")
    return 0


def run_morse_to_text(console):
    """Ask for Morse code and print the decoded text"""
    console.write_line("Enter the Morse code to be translated.")
    morse = console.read_line()

    translation = morse_to_text(morse)
    logger.debug(f"Decoded {len(morse.split(' '))} groups, "
                 f"{count_unknown_groups(morse)} unknown")

    console.write_line(f"Morse code: {morse}")
    console.write_line(f"Translation: {translation}")
    return 0


def run_help(console):
    """Show help text to the user"""
    console.write_line()
    console.write_line(HELP_TEXT)
    console.write_line()
    return 0


def run_translations(console):
    """Show the Morse code for every translatable character"""
    for line in list_translations():
        console.write_line(line)
    return 0


MODES = {
    't2m': run_text_to_morse,
    'encode': run_text_to_morse,
    'm2t': run_morse_to_text,
    'decode': run_morse_to_text,
    'help': run_help,
    'translations': run_translations,
    'list': run_translations,
}


def select_mode(args):
    """
    Pick the handler for the command line arguments.

    Raises UsageError unless exactly one known selector was given.
    """
    if len(args) != 1:
        amount = "only one" if len(args) > 1 else "an"
        raise UsageError(usage_message(f"You must specify {amount} argument."))

    mode = MODES.get(args[0])
    if mode is None:
        raise UsageError(
            usage_message("You may only specify the following arguments."))
    return mode


def main(argv=None, console=None):
    """Main console application"""
    if argv is None:
        argv = sys.argv[1:]

    write = console.write_line if console is not None else print

    try:
        config = load_config()
        setup_logging(config.log_level)
        mode = select_mode(argv)
    except UsageError as e:
        write(str(e))
        return e.exit_code
    except ConfigurationError as e:
        write(f"Error: {e}")
        return 1

    if console is None:
        console = Console(prompt=config.prompt)

    logger.debug(f"Running mode {argv[0]}")
    return mode(console)


if __name__ == "__main__":
    sys.exit(main())
