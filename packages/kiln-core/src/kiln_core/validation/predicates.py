"""
Named content predicates for generated config files.

The stages only ask these questions of file text; swapping substring matching
for a real TOML/HCL/YAML parser means changing this module alone.
"""

from collections.abc import Iterable

WORKER_NAME_ASSIGNMENT = "name = "
IN_PLACE_SUBSTITUTION = "sed -i"


def has_placeholder(text: str, token: str) -> bool:
    return token in text


def has_all_placeholders(text: str, tokens: Iterable[str]) -> bool:
    return all(has_placeholder(text, token) for token in tokens)


def has_binding(text: str, section: str) -> bool:
    return section in text


def has_worker_name(text: str) -> bool:
    return WORKER_NAME_ASSIGNMENT in text


def mentions(text: str, fragment: str) -> bool:
    return fragment in text


def mentions_any(text: str, fragments: Iterable[str]) -> bool:
    return any(fragment in text for fragment in fragments)


def uses_in_place_substitution(text: str) -> bool:
    return IN_PLACE_SUBSTITUTION in text
