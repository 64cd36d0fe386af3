"""Tests for content containers, grid and typography helpers."""

import pytest

from f7ui import (
    F7ArgumentError,
    f7_align,
    f7_badge,
    f7_block,
    f7_block_title,
    f7_button,
    f7_card,
    f7_col,
    f7_expandable_card,
    f7_flex,
    f7_float,
    f7_icon,
    f7_margin,
    f7_padding,
    f7_row,
    f7_segment,
    f7_shadow,
    f7_skeleton,
    f7_social_card,
    render,
    tags,
)


# =============================================================================
# Icons
# =============================================================================


def test_icon():
    icon = f7_icon("bars")
    assert icon.name == "i"
    assert icon.classes == ["icon", "f7-icons"]
    assert icon.children == ["bars"]


def test_icon_libraries():
    assert f7_icon("home", lib="ios").classes == ["icon", "f7-icons", "ios-only"]
    assert f7_icon("home", lib="md").classes == ["icon", "material-icons", "md-only"]
    with pytest.raises(F7ArgumentError, match="lib"):
        f7_icon("home", lib="fa")


def test_icon_color():
    assert f7_icon("home", color="red").has_class("color-red")
    with pytest.raises(F7ArgumentError, match="color"):
        f7_icon("home", color="magenta")


# =============================================================================
# Typography
# =============================================================================


def test_margin_returns_a_copy():
    div = tags.div("x")
    spaced = f7_margin(div, side="left")
    assert spaced.classes == ["margin-left"]
    assert div.classes == []


def test_padding():
    assert f7_padding(tags.div()).classes == ["padding"]
    assert f7_padding(tags.div(), side="vertical").classes == ["padding-vertical"]
    with pytest.raises(F7ArgumentError, match="side"):
        f7_padding(tags.div(), side="diagonal")


def test_decorators_need_a_tag():
    with pytest.raises(F7ArgumentError, match="expected a Tag"):
        f7_margin("text")


def test_align_and_float():
    assert f7_align(tags.p(), "center").classes == ["text-align-center"]
    assert f7_float(tags.p(), "right").classes == ["float-right"]
    with pytest.raises(F7ArgumentError):
        f7_float(tags.p(), "center")


def test_shadow():
    card = f7_shadow(tags.div(), 4, hover=True, pressed=True)
    assert card.classes == ["elevation-4", "elevation-hover-4", "elevation-pressed-4"]


@pytest.mark.parametrize("intensity", [-1, 25, 2.5, True, False])
def test_shadow_intensity(intensity):
    with pytest.raises(F7ArgumentError, match="intensity"):
        f7_shadow(tags.div(), intensity)


class TestSkeleton:
    def test_text_skeleton(self):
        line = tags.p("Loading")
        placeholder = f7_skeleton(line)
        assert placeholder.classes == ["skeleton-text", "skeleton-effect-fade"]
        assert line.classes == []

    def test_block_skeleton(self):
        box = f7_skeleton(tags.div(class_="card"), effect="wave", block=True)
        assert box.classes == ["card", "skeleton-block", "skeleton-effect-wave"]

    def test_unknown_effect(self):
        with pytest.raises(F7ArgumentError, match="effect"):
            f7_skeleton(tags.p(), effect="pulse")


# =============================================================================
# Grid
# =============================================================================


def test_grid():
    row = f7_row(f7_col("a"), f7_col("b"), gap=False)
    assert row.classes == ["row", "no-gap"]
    assert [col.classes for col in row.children] == [["col"], ["col"]]
    assert f7_flex("a").has_class("justify-content-space-between")


# =============================================================================
# Containers
# =============================================================================


def test_block():
    block = f7_block("text", strong=True, inset=True, hairlines=False)
    assert block.classes == ["block", "block-strong", "no-hairlines", "inset"]


def test_block_title():
    assert f7_block_title("Title", size="large").classes == ["block-title", "block-title-large"]
    with pytest.raises(F7ArgumentError, match="size"):
        f7_block_title("Title", size="huge")


class TestCard:
    def test_header_and_footer(self):
        card = f7_card("body", title="Title", footer="Footer", outline=True)
        assert card.classes == ["card", "card-outline"]
        header, content, footer = card.children
        assert header.classes == ["card-header"]
        assert content.classes == ["card-content", "card-content-padding"]
        assert footer.children == ["Footer"]

    def test_content_only(self):
        card = f7_card("body")
        assert len(card.children) == 1

    def test_height(self):
        content = f7_card("body", height=300).children[0]
        assert content.get_attr("style") == "height: 300px; overflow-y: auto;"
        content = f7_card("body", height="50vh").children[0]
        assert content.get_attr("style") == "height: 50vh; overflow-y: auto;"


# =============================================================================
# Buttons & badges
# =============================================================================


class TestButton:
    def test_action_button(self):
        button = f7_button("go", "Go", color="green", size="large")
        assert button.name == "button"
        assert button.get_attr("id") == "go"
        assert button.classes == [
            "button",
            "button-fill",
            "button-large",
            "color-green",
            "f7-action-button",
        ]

    def test_link_button(self):
        button = f7_button(label="Docs", href="https://framework7.io", outline=True)
        assert button.name == "a"
        assert button.classes == ["button", "button-outline", "external"]

    def test_href_and_input_id(self):
        with pytest.raises(F7ArgumentError, match="href"):
            f7_button("go", "Go", href="#")


def test_badge():
    badge = f7_badge("3", color="red")
    assert badge.name == "span"
    assert badge.classes == ["badge", "color-red"]


class TestSegment:
    def test_wraps_buttons(self):
        segment = f7_segment(
            f7_button("a", "A", fill=False),
            f7_button("b", "B", fill=False),
            raised=True,
            rounded=True,
        )
        assert segment.classes == ["block"]
        group = segment.children[0]
        assert group.classes == ["segmented", "segmented-raised", "segmented-round"]
        assert [b.get_attr("id") for b in group.children] == ["a", "b"]

    def test_strong(self):
        group = f7_segment(f7_button("a", "A"), strong=True).children[0]
        assert group.has_class("segmented-strong")

    @pytest.mark.parametrize("child", ["text", tags.div("x")])
    def test_only_buttons(self, child):
        with pytest.raises(F7ArgumentError, match="buttons"):
            f7_segment(f7_button("a", "A"), child)


# =============================================================================
# Special cards
# =============================================================================


class TestSocialCard:
    def test_author_header(self):
        card = f7_social_card(
            "Post body",
            author_img="avatar.png",
            author="Jane",
            date="Monday",
            footer="Likes",
        )
        assert card.classes == ["card", "f7-social-card"]
        header, content, footer = card.children
        assert [c.classes[0] for c in header.children] == [
            "f7-social-card-avatar",
            "f7-social-card-name",
            "f7-social-card-date",
        ]
        assert header.children[0].children[0].get_attr("src") == "avatar.png"
        assert content.children == ["Post body"]
        assert footer.children == ["Likes"]

    def test_minimal(self):
        card = f7_social_card("Body")
        assert len(card.children) == 2
        assert card.children[0].children == []


class TestExpandableCard:
    def test_color_band(self):
        card = f7_expandable_card("Body", id="card1", title="Title", subtitle="Sub", color="red")
        assert card.classes == ["card", "card-expandable"]
        assert card.get_attr("id") == "card1"
        content = card.children[0]
        band, padding = content.children
        assert band.classes == ["bg-color-red"]
        assert band.children[0].has_class("text-color-white")
        assert band.find(lambda t: t.has_class("card-close")) is not None
        assert padding.classes == ["card-content-padding"]
        assert padding.children == ["Body"]

    def test_image_band(self):
        card = f7_expandable_card("Body", title="Title", image="https://example.com/a.jpg")
        band = card.children[0].children[0]
        assert 'url("https://example.com/a.jpg")' in band.get_attr("style")

    def test_image_cannot_close_the_css(self):
        with pytest.raises(F7ArgumentError, match="image"):
            f7_expandable_card("Body", image='a.jpg"); color: red; ("')

    def test_color_and_image(self):
        with pytest.raises(F7ArgumentError, match="image"):
            f7_expandable_card("Body", color="red", image="a.jpg")

    def test_renders(self):
        html = render(f7_expandable_card("Body", title="Title"))
        assert html.startswith('<div class="card card-expandable"><div class="card-content">')
