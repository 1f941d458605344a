"""Factory method template: creators that make products."""

from __future__ import annotations

import sys
from typing import TextIO


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def _say(out: TextIO, text: str) -> None:
    out.write(text + "\n")


class Product:
    """Interface of what creators produce."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = _stream(out)

    def common_method(self) -> None:
        _say(self._out, "commonMethod called from Product interface")


class Product1(Product):
    def common_method(self) -> None:
        _say(self._out, "commonMethod called from Product1 class")


class Product2(Product):
    def common_method(self) -> None:
        _say(self._out, "commonMethod called from Product2 class")


class Creator:
    """Base creator; subclasses decide which product is made."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = _stream(out)

    def create_product(self) -> Product | None:
        """Factory method; the base creator makes no product."""
        return None

    def do_something(self) -> Product:
        """Make a product through the factory method and use it."""
        product = self.create_product()
        if product is None:
            raise RuntimeError("creator did not create a product")
        product.common_method()
        return product


class Creator1(Creator):
    def create_product(self) -> Product:
        _say(self._out, "CreateProduct of Creator1 is called. Creator1 creating Product1")
        return Product1(self._out)


class Creator2(Creator):
    def create_product(self) -> Product:
        _say(self._out, "CreateProduct of Creator2 is called. Creator2 creating Product2")
        return Product2(self._out)


class CreatorClient:
    """Client that uses whatever creator it was given."""

    def __init__(self, creator: Creator, out: TextIO | None = None) -> None:
        self.creator = creator
        self._out = _stream(out)

    def action(self) -> Product:
        self._out.write("\nClient Action\n")
        return self.creator.do_something()


_CREATORS = {1: Creator1, 2: Creator2}


def create_creator_client(kind: int, out: TextIO | None = None) -> CreatorClient:
    """Build a client with creator number `kind` (1 or 2).

    Raises ValueError for any other number.
    """
    try:
        creator_cls = _CREATORS[kind]
    except (KeyError, TypeError):
        raise ValueError(
            f"beep beep wrong Creator choice beep beep. There is no Creator{kind}"
        ) from None
    stream = _stream(out)
    return CreatorClient(creator_cls(stream), stream)