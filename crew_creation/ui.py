"""Shared styling for the wizard console."""

from questionary import Style

from crew_creation.render import StyleTag

STYLE = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
    ]
)

# prompt_toolkit style strings for render descriptor tags
TAG_STYLES: dict[StyleTag, str] = {
    StyleTag.DEFAULT: "",
    StyleTag.SELECTED: "fg:ansiblack bg:#f4ffe8",
    StyleTag.UNSELECTABLE: "fg:ansibrightblack",
    StyleTag.ERROR: "fg:ansired",
    StyleTag.OK: "fg:ansigreen",
}
