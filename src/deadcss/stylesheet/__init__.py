from deadcss.stylesheet.extractor import extract_selectors, looks_like_stylesheet
from deadcss.stylesheet.scanner import RuleBlock, iter_rules
from deadcss.stylesheet.selectors import parse_selector, split_selector_list

__all__ = [
    "extract_selectors",
    "looks_like_stylesheet",
    "RuleBlock",
    "iter_rules",
    "parse_selector",
    "split_selector_list",
]
