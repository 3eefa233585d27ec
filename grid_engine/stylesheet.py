"""
Stylesheet handoff.
This module assembles generated rules and declaration blocks into a
cssutils stylesheet for serialization.
"""

import logging
from typing import Iterable, Tuple

import cssutils

from .grid.generator import StyleRule
from .responsive.declarations import GenerationResult

# Suppress cssutils warning logs
cssutils.log.setLevel(logging.CRITICAL)

logger = logging.getLogger(__name__)


class StylesheetBuilder:
    """Builds cssutils stylesheets from engine output."""

    def __init__(self, minified: bool = False):
        """
        Initialize the builder.

        Args:
            minified: Whether serialized output is minified
        """
        cssutils.ser.prefs.useDefaults()
        cssutils.ser.prefs.keepAllProperties = True
        if minified:
            cssutils.ser.prefs.useMinified()
        self.minified = minified

        logger.debug(f"Stylesheet builder initialized (minified: {minified})")

    def style_rule(self, selector: str, declarations: Iterable[Tuple[str, str]]) -> cssutils.css.CSSStyleRule:
        """
        Create a style rule.

        Declarations are set through declaration text so that repeated
        properties (a pixel fallback followed by rem) are all kept.

        Args:
            selector: Selector text
            declarations: Ordered (property, value text) pairs

        Returns:
            cssutils.css.CSSStyleRule: The rule
        """
        style = cssutils.css.CSSStyleDeclaration(
            cssText="; ".join(f"{prop}: {value}" for prop, value in declarations)
        )
        return cssutils.css.CSSStyleRule(selectorText=selector, style=style)

    def build(self, rules: Iterable[StyleRule] = (),
              responsive: Iterable[Tuple[str, GenerationResult]] = ()) -> cssutils.css.CSSStyleSheet:
        """
        Build a stylesheet.

        Args:
            rules: Grid style rules, added in order
            responsive: (selector, generation result) pairs; base blocks become
                plain rules, conditional blocks become @media rules

        Returns:
            cssutils.css.CSSStyleSheet: The assembled stylesheet
        """
        sheet = cssutils.css.CSSStyleSheet()

        for rule in rules:
            sheet.add(self.style_rule(rule.selector, rule.declarations))

        for selector, result in responsive:
            for block in result.blocks:
                style_rule = self.style_rule(selector, block.declarations)
                if block.condition is None:
                    sheet.add(style_rule)
                    continue
                media_rule = cssutils.css.CSSMediaRule(mediaText=block.condition.media_text())
                media_rule.add(style_rule)
                sheet.add(media_rule)

        logger.debug(f"Built stylesheet with {len(sheet.cssRules)} rules")
        return sheet

    def serialize(self, sheet: cssutils.css.CSSStyleSheet) -> str:
        """
        Serialize a stylesheet to text.

        Args:
            sheet: Stylesheet to serialize

        Returns:
            str: CSS text
        """
        return sheet.cssText.decode('utf-8')


def build_stylesheet(rules: Iterable[StyleRule] = (),
                     responsive: Iterable[Tuple[str, GenerationResult]] = ()) -> cssutils.css.CSSStyleSheet:
    """Build a stylesheet with a default builder."""
    return StylesheetBuilder().build(rules, responsive)
