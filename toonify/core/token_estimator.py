"""Rough token estimates for comparing JSON and TOON payloads"""

from toonify.core.data_types import TokenReport

CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """Return the estimated token count for *text*, rounded up."""
    return -(-len(text) // CHARS_PER_TOKEN)


def compare_tokens(input_text: str, output_text: str) -> TokenReport:
    """Estimate tokens on both sides of a conversion."""
    return TokenReport(
        input_tokens=estimate_tokens(input_text),
        output_tokens=estimate_tokens(output_text),
    )
