def render_template(template: str, date: str, time: str, title: str) -> str:
    """Substitute ``{{date}}``, ``{{time}}`` and ``{{title}}`` placeholders literally."""
    return template.replace("{{date}}", date).replace("{{time}}", time).replace("{{title}}", title)
