"""
Greeting and farewell message generation for greet
"""

from enum import Enum

from greet.core.languages import Language


class MessageKind(Enum):
    """Kind of message to generate."""
    GREETING = "greeting"
    FAREWELL = "farewell"


PHRASES = {
    Language.EN: {MessageKind.GREETING: "Hello", MessageKind.FAREWELL: "Goodbye"},
    Language.FR: {MessageKind.GREETING: "Bonjour", MessageKind.FAREWELL: "Au revoir"},
    Language.ES: {MessageKind.GREETING: "Hola", MessageKind.FAREWELL: "Adiós"},
    Language.DE: {MessageKind.GREETING: "Hallo", MessageKind.FAREWELL: "Auf Wiedersehen"},
    Language.IT: {MessageKind.GREETING: "Ciao", MessageKind.FAREWELL: "Arrivederci"},
}


def get_phrase(language: Language, kind: MessageKind) -> str:
    """Return the base phrase for a language and message kind."""
    return PHRASES[language][kind]


def generate_message(name: str, language: Language, scream: bool, is_greeting: bool) -> str:
    """
    Build a greeting or farewell.

    Args:
        name: Who to address
        language: Language of the base phrase
        scream: Uppercase the whole message
        is_greeting: True for a greeting, False for a farewell

    Returns:
        Message of the form "<phrase> <name>!"
    """
    kind = MessageKind.GREETING if is_greeting else MessageKind.FAREWELL
    message = f"{get_phrase(language, kind)} {name}!"

    # str.upper() is locale independent and handles accents ("ADIÓS")
    if scream:
        message = message.upper()

    return message
