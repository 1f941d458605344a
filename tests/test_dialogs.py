import io

import pytest

from patterndemos.dialogs import (
    Button,
    Dialog,
    DialogClient,
    DialogType,
    HTMLButton,
    HTMLDialog,
    WindowButton,
    WindowDialog,
    create_dialog_client,
)


def test_default_button_messages():
    out = io.StringIO()
    button = Button(1, 2, out)
    button.on_click()
    button.render()
    assert out.getvalue().splitlines() == [
        "Button clicked without an action",
        "default button is rendered",
    ]
    assert (button.x, button.y) == (1, 2)


def test_window_dialog_render():
    out = io.StringIO()
    dialog = WindowDialog(0, 0, out)
    dialog.render()
    assert out.getvalue().splitlines() == [
        "window button is created.",
        "window button click action is defined",
        "window button got rendered",
        "dialog got rendered",
    ]
    assert isinstance(dialog.ok_button, WindowButton)


def test_html_dialog_render():
    out = io.StringIO()
    dialog = HTMLDialog(0, 0, out)
    dialog.render()
    assert out.getvalue().splitlines() == [
        "html button is created",
        "html button click action is defined",
        "html button got rendered",
        "dialog got rendered",
    ]
    assert isinstance(dialog.ok_button, HTMLButton)


@pytest.mark.parametrize("cls", [WindowDialog, HTMLDialog])
def test_button_is_offset_from_dialog(cls):
    dialog = cls(5, 7, io.StringIO())
    button = dialog.create_button()
    assert button.x - dialog.x == button.y - dialog.y
    assert button.x > dialog.x


def test_base_dialog_has_no_button():
    out = io.StringIO()
    dialog = Dialog(0, 0, out)
    with pytest.raises(RuntimeError):
        dialog.render()
    assert out.getvalue() == "default button is created.\n"
    assert dialog.ok_button is None


def test_client_action_output():
    out = io.StringIO()
    client = create_dialog_client(DialogType.HTML, out)
    client.action()
    assert out.getvalue().startswith("\nClient Action\nhtml button is created\n")
    assert isinstance(client.dialog, HTMLDialog)


def test_factory_window():
    out = io.StringIO()
    client = create_dialog_client(DialogType.WINDOW, out)
    assert isinstance(client, DialogClient)
    assert isinstance(client.dialog, WindowDialog)
    client.action()
    assert out.getvalue().splitlines() == [
        "",
        "Client Action",
        "window button is created.",
        "window button click action is defined",
        "window button got rendered",
        "dialog got rendered",
    ]


def test_factory_rejects_end():
    with pytest.raises(ValueError, match="beep beep wrong dialog choice"):
        create_dialog_client(DialogType.END, io.StringIO())