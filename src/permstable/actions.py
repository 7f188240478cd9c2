"""Constructors for the action lists shared by most resource types.

The *subject* passed to each helper is the singular label with its
indefinite article, e.g. ``"a host catalog"`` or ``"an account"``.
"""

from __future__ import annotations

from permstable.model import Action

_ARTICLES = ("an ", "a ")

TYPE_EXAMPLE = "type=<type>;actions={verb}"
ID_EXAMPLE = "ids=<id>;actions={verb}"
PIN_EXAMPLE = "ids=<pin>;type=<type>;actions={verb}"


def action(name: str, description: str, *examples: str) -> Action:
    """Shorthand for building an :class:`Action` with positional examples."""
    return Action(name=name, description=description, examples=examples)


def pluralize(subject: str) -> str:
    """Drop a leading indefinite article and append ``s``.

    >>> pluralize("an auth method")
    'auth methods'
    """
    for article in _ARTICLES:
        if subject.startswith(article):
            subject = subject[len(article):]
            break
    return f"{subject}s"


def list_only_actions(subject: str) -> list[Action]:
    """Return the single ``list`` action for a collection endpoint."""
    return [
        action("list", f"List {pluralize(subject)}", TYPE_EXAMPLE.format(verb="list")),
    ]


def create_list_actions(subject: str) -> list[Action]:
    """Return ``create`` followed by ``list`` for a collection endpoint."""
    return [
        action("create", f"Create {subject}", TYPE_EXAMPLE.format(verb="create")),
        *list_only_actions(subject),
    ]


def read_update_delete_actions(subject: str, pin: bool = False) -> list[Action]:
    """Return ``read``, ``update`` and ``delete`` for an item endpoint.

    With *pin*, each action also gets a pin-scoped example, for resources
    that are always addressed through a parent (a host under its host
    catalog, an account under its auth method).
    """
    ret = []
    for verb in ("read", "update", "delete"):
        examples = [ID_EXAMPLE.format(verb=verb)]
        if pin:
            examples.append(PIN_EXAMPLE.format(verb=verb))
        ret.append(action(verb, f"{verb.capitalize()} {subject}", *examples))
    return ret


def id_actions(pin: bool, *specs: tuple[str, str]) -> list[Action]:
    """Build custom item actions from ``(name, description)`` pairs.

    Each gets the ``ids=<id>`` example, plus the pin-scoped one with *pin*.
    """
    ret = []
    for name, description in specs:
        examples = [ID_EXAMPLE.format(verb=name)]
        if pin:
            examples.append(PIN_EXAMPLE.format(verb=name))
        ret.append(action(name, description, *examples))
    return ret
