"""HTML and plain-text bodies for transactional emails."""

from html import escape

from linguabud_functions.domain.emails import EmailMessage

_BRAND_COLOR = "#20bcba"

_LAYOUT = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
  </head>
  <body style="margin: 0; padding: 0; font-family: Arial, sans-serif; background-color: #f4f4f4;">
    <table role="presentation" style="width: 100%; border-collapse: collapse;">
      <tr>
        <td align="center" style="padding: 40px 0;">
          <table role="presentation" style="width: 600px; border-collapse: collapse; background-color: #ffffff;">
            <tr>
              <td style="padding: 40px 40px 20px 40px; text-align: center; background-color: {color};">
                <h1 style="margin: 0; color: #ffffff; font-size: 28px;">Lingua Bud</h1>
              </td>
            </tr>
            <tr>
              <td style="padding: 40px;">
{content}
              </td>
            </tr>
            <tr>
              <td style="padding: 30px 40px; background-color: #f8f9fa; border-top: 1px solid #e9ecef;">
                <p style="margin: 0; color: #999999; font-size: 12px; text-align: center;">
                  &copy; 2026 Lingua Bud. Connect with language partners worldwide.
                </p>
              </td>
            </tr>
          </table>
        </td>
      </tr>
    </table>
  </body>
</html>
"""

_BUTTON = (
    '<p style="margin: 30px 0 20px 0;">'
    '<a href="{url}" style="display: inline-block; padding: 14px 32px; '
    "background-color: {color}; color: #ffffff; text-decoration: none; "
    'border-radius: 4px; font-size: 16px; font-weight: bold;">{label}</a></p>'
)


def _render(title: str, content: str) -> str:
    return _LAYOUT.format(title=escape(title), color=_BRAND_COLOR, content=content)


def _button(url: str, label: str) -> str:
    return _BUTTON.format(url=escape(url), color=_BRAND_COLOR, label=escape(label))


def message_notification_email(
    *,
    to: str,
    sender_name: str,
    preview: str,
    messages_url: str,
    settings_url: str,
) -> EmailMessage:
    """Build the email telling a participant about a new message."""
    content = (
        f'<h2 style="margin: 0 0 20px 0; color: #333333;">'
        f"New Message from {escape(sender_name)}</h2>"
        '<p style="color: #666666; font-size: 16px;">'
        "You have received a new message on Lingua Bud:</p>"
        f'<div style="background-color: #f8f9fa; border-left: 4px solid {_BRAND_COLOR}; '
        'padding: 20px; margin: 20px 0;">'
        f'<p style="margin: 0; color: #333333; font-style: italic;">'
        f"&quot;{escape(preview)}&quot;</p></div>"
        f"{_button(messages_url, 'View Message')}"
        '<p style="color: #999999; font-size: 14px;">'
        "Don't want to receive these emails? You can turn off email notifications "
        f'in your <a href="{escape(settings_url)}" style="color: {_BRAND_COLOR};">'
        "dashboard settings</a>.</p>"
    )
    text = (
        f"New message from {sender_name}\n\n"
        f'"{preview}"\n\n'
        f"View your message at: {messages_url}\n\n"
        "Don't want to receive these emails? Turn off notifications in your "
        f"dashboard: {settings_url}\n\n"
        "© 2026 Lingua Bud"
    )
    return EmailMessage(
        to=to,
        subject=f"New message from {sender_name}",
        html=_render("New Message on Lingua Bud", content),
        text=text,
    )


def booking_notification_email(  # noqa: PLR0913
    *,
    to: str,
    instructor_name: str | None,
    student_name: str,
    date_text: str | None,
    time_text: str | None,
    amount_text: str | None,
    dashboard_url: str,
) -> EmailMessage:
    """Build the email telling an instructor about a new booking."""
    greeting = f"Hi {instructor_name}," if instructor_name else "Hi,"
    details = [("Student", student_name)]
    if date_text:
        details.append(("Date", date_text))
    if time_text:
        details.append(("Time", time_text))
    if amount_text:
        details.append(("Amount paid", amount_text))

    rows = "".join(
        f'<tr><td style="padding: 6px 12px 6px 0; color: #999999;">{escape(label)}</td>'
        f'<td style="padding: 6px 0; color: #333333;">{escape(value)}</td></tr>'
        for label, value in details
    )
    content = (
        '<h2 style="margin: 0 0 20px 0; color: #333333;">New Lesson Booked</h2>'
        f'<p style="color: #666666; font-size: 16px;">{escape(greeting)}</p>'
        f'<p style="color: #666666; font-size: 16px;">'
        f"{escape(student_name)} has booked a lesson with you.</p>"
        f'<table role="presentation" style="margin: 20px 0;">{rows}</table>'
        f"{_button(dashboard_url, 'View Dashboard')}"
    )
    text_lines = [greeting, "", f"{student_name} has booked a lesson with you.", ""]
    text_lines.extend(f"{label}: {value}" for label, value in details)
    text_lines.extend(["", f"View your dashboard: {dashboard_url}", "", "© 2026 Lingua Bud"])
    return EmailMessage(
        to=to,
        subject=f"New lesson booked with {student_name}",
        html=_render("New Lesson Booked", content),
        text="\n".join(text_lines),
    )


def contact_email(
    *, to: str, name: str, email: str, message: str
) -> EmailMessage:
    """Build the email forwarding a contact form submission to the operator."""
    content = (
        '<h2 style="margin: 0 0 20px 0; color: #333333;">New Contact Form Submission</h2>'
        f'<p style="color: #666666;"><strong>Name:</strong> {escape(name)}</p>'
        f'<p style="color: #666666;"><strong>Email:</strong> {escape(email)}</p>'
        f'<div style="background-color: #f8f9fa; border-left: 4px solid {_BRAND_COLOR}; '
        'padding: 20px; margin: 20px 0; white-space: pre-wrap;">'
        f"{escape(message)}</div>"
    )
    text = (
        "New contact form submission\n\n"
        f"Name: {name}\n"
        f"Email: {email}\n\n"
        f"{message}"
    )
    return EmailMessage(
        to=to,
        subject=f"Contact form: {name}",
        html=_render("New Contact Form Submission", content),
        text=text,
        reply_to=email,
    )
