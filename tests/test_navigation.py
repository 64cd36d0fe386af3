"""Tests for navbars, toolbars, tabs and panels."""

import pytest

from f7ui import (
    F7ArgumentError,
    f7_link,
    f7_navbar,
    f7_panel,
    f7_panel_item,
    f7_panel_menu,
    f7_sub_navbar,
    f7_tab,
    f7_tab_link,
    f7_tabs,
    f7_toolbar,
    tags,
)
from f7ui.navigation import Tab, check_id, tab_id


# =============================================================================
# Navbar
# =============================================================================


class TestNavbar:
    def test_default_structure(self):
        navbar = f7_navbar(title="Title")
        assert navbar.classes == ["navbar"]
        background, inner = navbar.children
        assert background.classes == ["navbar-bg"]
        assert inner.classes == ["navbar-inner", "sliding"]
        title = inner.children[0]
        assert title.classes == ["title"]
        assert title.children == ["Title"]

    def test_hairline_and_shadow_off(self):
        navbar = f7_navbar(hairline=False, shadow=False)
        assert navbar.classes == ["navbar", "no-hairline", "no-shadow"]

    def test_panel_openers(self):
        """Panel buttons are links carrying the side they open."""
        navbar = f7_navbar(title="T", left_panel=True, right_panel=True)
        inner = navbar.children[1]
        left, title, right = inner.children
        assert left.classes == ["left"]
        assert right.classes == ["right"]
        opener = left.children[0]
        assert opener.name == "a"
        assert opener.classes == ["link", "icon-only", "panel-open"]
        assert opener.get_attr("data-panel") == "left"
        assert right.children[0].get_attr("data-panel") == "right"

    def test_subtitle(self):
        navbar = f7_navbar(title="T", subtitle="Sub")
        subtitle = navbar.find(lambda t: t.has_class("subtitle"))
        assert subtitle.children == ["Sub"]

    def test_bigger(self):
        navbar = f7_navbar(title="Big", subtitle="ignored", bigger=True)
        assert "navbar-large" in navbar.classes
        large = navbar.find(lambda t: t.has_class("title-large-text"))
        assert large.children == ["Big"]
        assert navbar.find(lambda t: t.has_class("subtitle")) is None

    def test_transparent_implies_large(self):
        navbar = f7_navbar(title="T", transparent=True)
        assert navbar.classes == ["navbar", "navbar-large", "navbar-transparent"]

    def test_sub_navbar_goes_last(self):
        navbar = f7_navbar(title="T", sub_navbar=f7_sub_navbar("segmented"))
        sub = navbar.children[1].children[-1]
        assert sub.classes == ["subnavbar"]
        assert sub.children[0].classes == ["subnavbar-inner"]


# =============================================================================
# Toolbar
# =============================================================================


def test_toolbar_position():
    toolbar = f7_toolbar("a", position="top")
    assert toolbar.classes == ["toolbar", "toolbar-top"]
    assert toolbar.children[0].classes == ["toolbar-inner"]
    assert toolbar.children[0].children == ["a"]


def test_toolbar_options():
    toolbar = f7_toolbar(icons=True, scrollable=True, hairline=False, shadow=False)
    assert toolbar.classes == [
        "toolbar",
        "toolbar-bottom",
        "tabbar-labels",
        "tabbar-scrollable",
        "no-hairline",
        "no-shadow",
    ]


def test_toolbar_invalid_position():
    with pytest.raises(F7ArgumentError, match="position"):
        f7_toolbar(position="left")


# =============================================================================
# Tabs
# =============================================================================


def test_tab_id_sanitizes_names():
    assert tab_id("Tab 1") == "Tab_1"
    assert tab_id("tab-2") == "tab-2"
    with pytest.raises(F7ArgumentError):
        tab_id("!!!")


@pytest.mark.parametrize("value", ["sidebar", "f7-sidebar_2"])
def test_check_id_accepts_selector_safe_ids(value):
    assert check_id("id", value) == value


@pytest.mark.parametrize("value", ["a'b", "a.b", "a b", "1st", "", "x');alert(1);//", None])
def test_check_id_rejects_unsafe_ids(value):
    with pytest.raises(F7ArgumentError, match="'id'"):
        check_id("id", value)


class TestTabLink:
    def test_label_and_icon(self):
        link = f7_tab_link("Home", icon=tags.i("house"), href="#home", active=True)
        assert link.name == "a"
        assert link.classes == ["tab-link", "tab-link-active"]
        assert link.get_attr("href") == "#home"
        icon, label = link.children
        assert icon.name == "i"
        assert label.classes == ["tabbar-label"]
        assert label.children == ["Home"]

    def test_icon_only(self):
        link = f7_tab_link(icon=tags.i("house"))
        assert len(link.children) == 1
        assert not link.has_class("tab-link-active")

    def test_needs_label_or_icon(self):
        with pytest.raises(F7ArgumentError, match="label"):
            f7_tab_link()


def test_tab_attributes():
    tab = f7_tab("content", tab_name="Tab 1")
    assert isinstance(tab, Tab)
    assert tab.classes == ["page-content", "tab"]
    assert tab.get_attr("id") == "Tab_1"
    assert tab.get_attr("data-value") == "Tab 1"
    assert tab.get_attr("data-active") == "false"
    assert tab.children == ["content"]
    assert not tab.active


def test_active_tab():
    tab = f7_tab(tab_name="A", active=True)
    assert tab.active
    assert tab.get_attr("data-active") == "true"


class TestTabs:
    def tabs(self, **kwargs):
        return f7_tabs(
            f7_tab("one", tab_name="Tab 1"),
            f7_tab("two", tab_name="Tab 2"),
            **kwargs,
        )

    def test_toolbar_links(self):
        """The tabbar has one link per tab, targeting the tab id."""
        toolbar, _ = self.tabs()
        assert toolbar.classes == ["toolbar", "toolbar-bottom", "tabbar-labels", "tabbar"]
        links = toolbar.find_all(lambda t: t.has_class("tab-link"))
        assert [link.get_attr("href") for link in links] == ["#Tab_1", "#Tab_2"]
        label = links[0].find(lambda t: t.has_class("tabbar-label"))
        assert label.children == ["Tab 1"]

    def test_first_tab_is_activated(self):
        toolbar, wrapper = self.tabs()
        first, second = wrapper.children[0].children
        assert first.active
        assert not second.active
        links = toolbar.find_all(lambda t: t.has_class("tab-link"))
        assert links[0].has_class("tab-link-active")
        assert not links[1].has_class("tab-link-active")

    def test_explicit_active_tab_is_kept(self):
        toolbar, wrapper = f7_tabs(f7_tab(tab_name="A"), f7_tab(tab_name="B", active=True))
        first, second = wrapper.children[0].children
        assert not first.active
        assert second.active

    def test_caller_tabs_are_not_mutated(self):
        tab = f7_tab(tab_name="A")
        f7_tabs(tab)
        assert not tab.active

    def test_icons_go_in_the_links(self):
        icon = tags.i("email", class_="icon f7-icons")
        toolbar, _ = f7_tabs(f7_tab(tab_name="Mail", icon=icon))
        link = toolbar.find(lambda t: t.has_class("tab-link"))
        assert link.children[0].name == "i"

    def test_animated_wrapper(self):
        _, wrapper = self.tabs(id="tabset")
        assert wrapper.classes == ["tabs-animated-wrap"]
        assert wrapper.children[0].classes == ["tabs"]
        assert wrapper.children[0].get_attr("id") == "tabset"

    def test_swipeable_wins_over_animated(self):
        _, wrapper = self.tabs(swipeable=True, animated=True)
        assert wrapper.classes == ["tabs-swipeable-wrap"]

    def test_no_wrapper(self):
        _, wrapper = self.tabs(animated=False)
        assert wrapper.classes == ["tabs"]

    def test_several_active_tabs(self):
        with pytest.raises(F7ArgumentError, match="only one tab"):
            f7_tabs(f7_tab(tab_name="A", active=True), f7_tab(tab_name="B", active=True))

    def test_duplicate_tab_names(self):
        with pytest.raises(F7ArgumentError, match="duplicate"):
            f7_tabs(f7_tab(tab_name="A"), f7_tab(tab_name="A"))

    def test_only_tabs_allowed(self):
        with pytest.raises(F7ArgumentError, match="expected f7_tab"):
            f7_tabs(tags.div())

    def test_at_least_one_tab(self):
        with pytest.raises(F7ArgumentError):
            f7_tabs()


# =============================================================================
# Panels
# =============================================================================


class TestPanel:
    def test_structure(self):
        """panel > view > page > navbar, page-content."""
        panel = f7_panel("content", title="Menu")
        assert panel.classes == ["panel", "panel-left", "panel-reveal", "theme-dark"]
        assert panel.get_attr("data-side") == "left"
        view = panel.children[0]
        assert view.classes == ["view"]
        page = view.children[0]
        assert page.classes == ["page"]
        navbar, content = page.children
        assert navbar.has_class("navbar")
        assert content.classes == ["page-content"]
        assert content.children == ["content"]

    def test_without_title(self):
        page = f7_panel("content").children[0].children[0]
        assert len(page.children) == 1

    def test_options(self):
        panel = f7_panel(id="right", side="right", theme="light", effect="cover", resizable=True)
        assert panel.classes == [
            "panel",
            "panel-right",
            "panel-cover",
            "theme-light",
            "panel-resizable",
        ]
        assert panel.get_attr("id") == "right"

    @pytest.mark.parametrize(
        "kwargs",
        [{"side": "top"}, {"theme": "blue"}, {"effect": "push"}],
    )
    def test_invalid_options(self, kwargs):
        with pytest.raises(F7ArgumentError):
            f7_panel(**kwargs)


def test_panel_menu():
    menu = f7_panel_menu(f7_panel_item("Tab 1", "tab1"), id="menu")
    assert menu.classes == ["list", "links-list"]
    ul = menu.children[0]
    assert ul.get_attr("id") == "menu"
    assert ul.children[0].name == "li"


def test_panel_item():
    item = f7_panel_item("Tab 1", "tab1", active=True)
    link = item.children[0]
    assert link.get_attr("href") == "#tab1"
    assert link.get_attr("data-tab") == "#tab1"
    assert link.classes == ["tab-link", "panel-close", "tab-link-active"]


# =============================================================================
# Links
# =============================================================================


def test_link():
    link = f7_link("Docs", href="https://framework7.io", external=True)
    assert link.classes == ["link", "external"]
    assert link.get_attr("href") == "https://framework7.io"


def test_icon_only_link():
    link = f7_link(icon=tags.i("bars"))
    assert link.classes == ["link", "icon-only"]


def test_link_needs_label_or_icon():
    with pytest.raises(F7ArgumentError):
        f7_link(href="#")
