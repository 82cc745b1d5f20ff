"""
Input text normalizer for consistent matching.
Rewrites chat slang and common typos into a canonical lexical form.
"""
import re

WS_RE = re.compile(r"\s+")

# Slang expansions. Keys may contain spaces ("h r u"); the whole-utterance
# table below is keyed by the same phrases with all whitespace removed.
SLANG_MAP = {
    "h r u": "how are you",
    "hru": "how are you",
    "wbu": "what about you",
    "hbu": "how about you",
    "idk": "i don't know",
    "brb": "be right back",
    "g2g": "got to go",
    "gtg": "got to go",
    "sup": "what's up",
    "u": "you",
    "r": "are",
    "im": "i'm",
    "omg": "oh my god",
    "wya": "where are you at",
    "lmk": "let me know",
    "wud": "what would you do",
}

TYPO_MAP = {
    "waether": "weather",
    "wether": "weather",
    "wheather": "weather",
    "tempreature": "temperature",
    "calcuator": "calculator",
    "calculater": "calculator",
    "flipp": "flip",
}

UTTERANCE_SLANG = {WS_RE.sub("", k): v for k, v in SLANG_MAP.items()}
WORD_SLANG = {k: v for k, v in SLANG_MAP.items() if " " not in k}


def collapse(text: str) -> str:
    """Lowercase, collapse whitespace runs to one space and trim."""
    return WS_RE.sub(" ", (text or "").lower()).strip()


def compress(text: str) -> str:
    """Remove ALL whitespace."""
    return WS_RE.sub("", text or "")


def normalize(text: str) -> str:
    """
    Normalize raw chat input.

    Steps:
        1. Lowercase, collapse whitespace, trim
        2. If the whitespace-free form is a known slang utterance,
           return its expansion ("h r u" -> "how are you")
        3. Otherwise replace each word via the slang table, then the
           typo table; unknown words pass through verbatim

    Punctuation is left alone, so "wether?" is not corrected.
    """
    text = collapse(text)

    expanded = UTTERANCE_SLANG.get(compress(text))
    if expanded is not None:
        return expanded

    if not text:
        return ""

    words = []
    for word in text.split(" "):
        if word in WORD_SLANG:
            words.append(WORD_SLANG[word])
        elif word in TYPO_MAP:
            words.append(TYPO_MAP[word])
        else:
            words.append(word)
    return " ".join(words)
