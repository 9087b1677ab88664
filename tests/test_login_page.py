import pytest

from cart_monitor.core.errors import ExtractionError
from cart_monitor.pages.login_page import LoginPage
from tests.fakes import FakeNode, button


def login_form(on_enter=None, on_submit=None):
    username = FakeNode(matches={'input[name="j_username"]'})
    password = FakeNode(matches={'#current-password'}, on_press=on_enter)
    submit = button("Autentificare", on_click=on_submit)
    return username, password, submit


async def test_login_submits_with_enter(page, context):
    def redirect(p, key, node):
        p.url = "https://shop.test/my-account"

    username, password, submit = login_form(on_enter=redirect)
    page.on_goto = lambda p, url: p.set_content(username, password, submit)

    await LoginPage(page, context).login("test@example.com", "secret")

    assert page.gotos == ["https://shop.test/login"]
    assert username.value == "test@example.com"
    assert password.value == "secret"
    assert password.pressed == ['Enter']
    assert submit.clicks == []


async def test_login_clicks_button_when_enter_did_not_navigate(page, context):
    def redirect(p):
        p.url = "https://shop.test/"

    username, password, submit = login_form(on_submit=redirect)
    page.on_goto = lambda p, url: p.set_content(username, password, submit)

    await LoginPage(page, context).login("test@example.com", "secret")

    assert submit.clicks == [{'force': True}]


async def test_login_that_stays_on_login_page_fails(page, context):
    username, password, submit = login_form()
    page.on_goto = lambda p, url: p.set_content(username, password, submit)

    with pytest.raises(ExtractionError, match="Logowanie nieudane"):
        await LoginPage(page, context).login("test@example.com", "wrong")
