"""
Prompt builders for AI-drafted invoice text.

Each builder returns the free-text prompt sent to the text generation
model. They are pure functions so the exact prompt can be inspected
in tests without calling the API.
"""

from invoice_hub.utils import format_symbol_amount

COMPANY_NAME = "Clonmel Glass & Mirrors"


def build_invoice_notes_prompt(customer_name: str, items_description: str) -> str:
    """Return the prompt for the invoice notes section."""
    return f"""You are writing professional invoice notes for {COMPANY_NAME}, a premium glass and mirror installation company.

Customer: {customer_name}
Items ordered: {items_description}

Create comprehensive, professional invoice notes that include:
1. A warm, personalized thank you message acknowledging their specific order
2. Payment terms (e.g., "Payment is kindly requested within 30 days of invoice date")
3. A brief mention of quality assurance or warranty (e.g., "All products come with our quality guarantee")
4. Banking/payment instructions (e.g., "Bank transfer details are provided below" or "Multiple payment methods accepted")
5. A professional closing with contact information offer

Tone: Professional, warm, and customer-focused
Style: Well-structured with clear sections
Length: 4-6 sentences, well-formatted
Format: Use proper punctuation and paragraph breaks where appropriate.

Make it feel premium and trustworthy while being friendly and approachable."""


def reminder_context(days_difference: int) -> str:
    """
    Describe the payment timing for a reminder.

    Args:
        days_difference: Days until the due date; negative when overdue.

    Returns:
        Status sentence completing "The payment ...".
    """
    if days_difference < 0:
        return f"is OVERDUE by {abs(days_difference)} days. Be firm but professional."
    if days_difference == 0:
        return "is DUE TODAY. Be polite and remind them of the deadline."
    return f"is UPCOMING in {days_difference} days. This is a proactive friendly reminder."


def build_reminder_prompt(
    customer_name: str, invoice_num: str, balance: float, days_difference: int
) -> str:
    """Return the prompt for a payment reminder email."""
    return "\n".join(
        [
            f"Draft a payment reminder email for {COMPANY_NAME}.",
            f"Customer: {customer_name}.",
            f"Invoice: {invoice_num}.",
            f"Balance Due: {format_symbol_amount(balance)}.",
            f"Status: The payment {reminder_context(days_difference)}",
            "Include a request for settlement. Max 3 sentences.",
        ]
    )


def build_product_description_prompt(product_name: str) -> str:
    """Return the prompt for a short catalogue description."""
    return (
        "Write a short, attractive product description (max 20 words) "
        f'for a glass/mirror product named "{product_name}".'
    )


def build_trends_prompt(summary_text: str) -> str:
    """Return the prompt for invoice trend insights."""
    return (
        "Analyze this invoice summary data and give 3 bullet points on sales "
        "performance and outstanding payments. Keep it brief. "
        f"Data: {summary_text}"
    )
