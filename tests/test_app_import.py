import importlib


def test_app_package_exports_main():
    module = importlib.import_module("app")

    assert hasattr(module, "main"), "app package should expose main entrypoint"


def test_navigation_links_cover_both_tools():
    from app.layout import NAV_LINKS

    assert [link.slug for link in NAV_LINKS] == ["expenses", "logo"]


def test_card_escapes_title_and_suffix(monkeypatch):
    import contextlib

    import streamlit as st

    from app.layout import card

    rendered: list[str] = []
    monkeypatch.setattr(st, "container", contextlib.nullcontext)
    monkeypatch.setattr(st, "markdown", lambda body, **_: rendered.append(body))

    with card("Costs & <b>fees</b>", suffix="<script>x</script>"):
        pass

    head = rendered[-1]
    assert "Costs &amp; &lt;b&gt;fees&lt;/b&gt;" in head
    assert "&lt;script&gt;x&lt;/script&gt;" in head
    assert "<script>" not in head
