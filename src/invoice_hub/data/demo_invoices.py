"""Demo invoices used by the Dash UI and the test suite."""

from invoice_hub.models.invoice import Invoice, LineItem, PaymentStatus

DEMO_INVOICES: list[Invoice] = [
    Invoice(
        invoice_number="INV-1001",
        customer_name="",
        date_issued="02/10/2026",
        due_date="01/11/2026",
        items=[
            LineItem(
                description="Mirror 1200x800",
                quantity=1,
                unit_price=150.00,
                total=150.00,
            ),
        ],
        tax_rate=23,
        subtotal=150.00,
        tax_amount=34.50,
        total=184.50,
        balance_due=184.50,
        status=PaymentStatus.UNPAID,
    ),
    Invoice(
        invoice_number="INV-1002",
        customer_name="Fethard Dental Practice",
        date_issued="15/09/2026",
        due_date="15/10/2026",
        items=[
            LineItem(
                description="Toughened glass splashback, 10mm, polished edges",
                quantity=2,
                unit_price=210.00,
                total=420.00,
            ),
            LineItem(
                description="Installation labour (hours)",
                quantity=3.5,
                unit_price=45.00,
                total=157.50,
            ),
        ],
        tax_rate=13.5,
        subtotal=577.50,
        tax_amount=77.96,
        total=655.46,
        balance_due=327.73,
        status=PaymentStatus.PARTIAL,
    ),
    Invoice(
        invoice_number="INV-1003",
        customer_name="Suir Valley Hotel",
        date_issued="01/09/2026",
        due_date="01/10/2026",
        items=[
            LineItem(
                description="Frameless shower screen 900mm",
                quantity=4,
                unit_price=395.00,
                total=1580.00,
            ),
            LineItem(
                description="Bevelled wall mirror 600x900",
                quantity=4,
                unit_price=120.00,
                total=480.00,
            ),
        ],
        tax_rate=23,
        subtotal=2060.00,
        tax_amount=473.80,
        total=2533.80,
        balance_due=0,
        status=PaymentStatus.PAID,
    ),
]
