"""`stanpos.api.util.tagsets` provides descriptions of part-of-speech tags.

Penn Treebank tags: https://www.ling.upenn.edu/courses/Fall_2003/ling001/penn_treebank_pos.html
Chinese Penn Treebank tags: https://www.sketchengine.eu/chinese-penn-treebank-part-of-speech-tagset/
"""

from __future__ import annotations

from types import MappingProxyType

PENN = MappingProxyType({
    "CC": "Coordinating conjunction",
    "CD": "Cardinal number",
    "DT": "Determiner",
    "EX": "Existential there",
    "FW": "Foreign word",
    "IN": "Preposition or subordinating conjunction",
    "JJ": "Adjective",
    "JJR": "Adjective, comparative",
    "JJS": "Adjective, superlative",
    "LS": "List item marker",
    "MD": "Modal",
    "NN": "Noun, singular or mass",
    "NNS": "Noun, plural",
    "NNP": "Proper noun, singular",
    "NNPS": "Proper noun, plural",
    "PDT": "Predeterminer",
    "POS": "Possessive ending",
    "PRP": "Personal pronoun",
    "PRP$": "Possessive pronoun",
    "RB": "Adverb",
    "RBR": "Adverb, comparative",
    "RBS": "Adverb, superlative",
    "RP": "Particle",
    "SYM": "Symbol",
    "TO": "to",
    "UH": "Interjection",
    "VB": "Verb, base form",
    "VBD": "Verb, past tense",
    "VBG": "Verb, gerund or present participle",
    "VBN": "Verb, past participle",
    "VBP": "Verb, non-3rd person singular present",
    "VBZ": "Verb, 3rd person singular present",
    "WDT": "Wh-determiner",
    "WP": "Wh-pronoun",
    "WP$": "Possessive wh-pronoun",
    "WRB": "Wh-adverb",
})

CHINESE = MappingProxyType({
    "AD": "Adverb",
    "AS": "Aspect marker",
    "BA": "把 in ba-construction",
    "CS": "Subordinating conjunction",
    "DEC": "的 in a relative-clause",
    "DEG": "Associative",
    "DER": "In V-de const. and V-de-R",
    "DEV": "地 before VP",
    "ETC": "For words 等, 等等",
    "IJ": "Interjection",
    "LB": "被 in long bei-const",
    "LC": "Localizer",
    "M": "Measure word",
    "MSP": "Other particle",
    "NR": "Proper noun",
    "NT": "Temporal noun",
    "OD": "Ordinal number",
    "ON": "Onomatopoeia",
    "P": "Prepositions (excluding 把 and 被)",
    "PN": "Pronoun",
    "PU": "Punctuation",
    "SB": "被 in short bei-const",
    "SP": "Sentence final particle",
    "VA": "Predicative adjective",
    "VC": "Copula",
    "VE": "有 as the main verb",
    "VV": "Other verbs",
    "X": "Numbers and units, mathematical sign",
})

# Both tagsets combined; Penn descriptions take precedence for shared tags
DESCRIPTIONS = MappingProxyType({**CHINESE, **PENN})

TAGSETS = MappingProxyType({"penn": PENN, "chinese": CHINESE, "all": DESCRIPTIONS})


def describe(tag: str) -> str:
    """Get a human-readable description of a part-of-speech tag.

    Args:
        tag: The tag, e.g. "NN".

    Returns:
        The description, or an empty string if the tag is unknown.
    """
    return DESCRIPTIONS.get(tag, "")
