import io

import pytest

from patterndemos.creators import (
    Creator,
    Creator1,
    Creator2,
    CreatorClient,
    Product,
    Product1,
    Product2,
    create_creator_client,
)


def test_product_messages():
    out = io.StringIO()
    Product(out).common_method()
    Product1(out).common_method()
    Product2(out).common_method()
    assert out.getvalue().splitlines() == [
        "commonMethod called from Product interface",
        "commonMethod called from Product1 class",
        "commonMethod called from Product2 class",
    ]


@pytest.mark.parametrize(
    "creator_cls, product_cls",
    [(Creator1, Product1), (Creator2, Product2)],
)
def test_creators_make_their_product(creator_cls, product_cls):
    product = creator_cls(io.StringIO()).create_product()
    assert type(product) is product_cls


def test_base_creator_makes_nothing():
    creator = Creator(io.StringIO())
    assert creator.create_product() is None
    with pytest.raises(RuntimeError):
        creator.do_something()


def test_client_one_action():
    out = io.StringIO()
    client = create_creator_client(1, out)
    product = client.action()
    assert isinstance(product, Product1)
    assert out.getvalue() == (
        "\nClient Action\n"
        "CreateProduct of Creator1 is called. Creator1 creating Product1\n"
        "commonMethod called from Product1 class\n"
    )


def test_client_two_action():
    out = io.StringIO()
    client = create_creator_client(2, out)
    assert isinstance(client, CreatorClient)
    assert isinstance(client.creator, Creator2)
    client.action()
    assert out.getvalue().endswith("commonMethod called from Product2 class\n")


def test_unknown_creator():
    with pytest.raises(ValueError) as info:
        create_creator_client(3, io.StringIO())
    assert str(info.value) == (
        "beep beep wrong Creator choice beep beep. There is no Creator3"
    )