"""
HTML for the control panel. The router treats these as opaque strings.
"""

from html import escape

DEFAULT_TITLE = "Glider Control Panel"

# One form per control endpoint: (path, button label)
CONTROLS = (
    ("/activate", "Activate Flight Control"),
    ("/deactivate", "Deactivate Flight Control"),
    ("/calibrate", "Calibrate/Zero"),
)


def render_header(title: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="initial-scale=1, width=device-width">\n'
        f"<title>{escape(title)}</title>\n"
        "</head>\n"
    )


def render_index(title: str = DEFAULT_TITLE) -> str:
    """Main page: a submit button per control endpoint."""
    forms = "\n".join(
        f'<form action="{path}"><input type="submit" value="{label}"></form>'
        for path, label in CONTROLS
    )
    return (
        render_header(title)
        + "<body>\n<main>\n"
        + f"<h1>{escape(title)}</h1>\n"
        + "<h2>Control Panel</h2>\n"
        + forms
        + "\n</main>\n</body>\n</html>\n"
    )


def render_ack(target: str = "/", delay: int = 1) -> str:
    """Acknowledgement page that bounces the browser back to `target`."""
    target = escape(target)
    return (
        "<!DOCTYPE html> <html> <head>\n"
        f"<meta http-equiv=\"refresh\" content=\"{delay}; url='{target}'\" />\n"
        f"</head> <body> <p> <a href='{target}'>Back to main page</a></p>"
        "</body> </html>"
    )
