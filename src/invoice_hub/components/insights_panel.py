"""
Invoice insights and preview panels.

The insights panel asks the notes service for three bullet points on
sales and outstanding payments. The preview panel hosts an iframe that
shows a rendered invoice PDF from a data URL.
"""

from dash import dcc, html
from dash_iconify import DashIconify


def build_insights_panel(ai_available: bool = False) -> html.Div:
    """
    Build the trend insights card.

    Args:
        ai_available: If True, shows the AI badge next to the title.

    Returns:
        Card-styled div with the analyze button and output area.
    """
    title_children = [
        DashIconify(icon="lucide:trending-up", className="title-icon"),
        html.H3("Insights"),
    ]
    if ai_available:
        title_children.append(html.Span("AI", className="badge secondary"))

    return html.Div(
        className="card insights-card",
        children=[
            html.Div(className="title-row", children=title_children),
            html.Button(
                "Analyze invoices",
                id="insights-button",
                className="button primary gap",
            ),
            dcc.Loading(
                html.Pre(id="insights-output", className="ai-output"),
                type="dot",
            ),
        ],
    )


def build_preview_panel() -> html.Div:
    """Return the hidden PDF preview card."""
    return html.Div(
        id="preview-panel",
        className="card preview-card hidden",
        children=[
            html.Div(
                className="title-row",
                children=[
                    DashIconify(icon="lucide:eye", className="title-icon"),
                    html.H3(id="preview-title", children="Preview"),
                ],
            ),
            html.Iframe(id="preview-frame", className="preview-frame"),
        ],
    )
