import html

from src.app.services.mail_sender import MailMessage


def build_reset_url(frontend_url: str, token: str) -> str:
    return f"{frontend_url.rstrip('/')}/auth/reset-password/{token}"


def build_reset_email(to: str, name: str, reset_url: str, app_name: str) -> MailMessage:
    html_body = f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
    <h2 style="color: #059669;">Password Recovery</h2>
    <p>Hi <strong>{html.escape(name)}</strong>,</p>
    <p>We received a request to reset the password of your {app_name} account.</p>
    <p>Click the link below to choose a new password:</p>
    <div style="text-align: center; margin: 30px 0;">
        <a href="{reset_url}"
           style="background-color: #059669; color: white; padding: 12px 24px;
                  text-decoration: none; border-radius: 6px; display: inline-block;">
            Reset Password
        </a>
    </div>
    <p><strong>This link expires in 1 hour.</strong></p>
    <p>If you did not request this change, you can ignore this email.</p>
    <hr style="margin: 30px 0; border: none; border-top: 1px solid #e5e7eb;">
    <p style="color: #6b7280; font-size: 14px;">
        If the button does not work, copy and paste this link into your browser:<br>
        <a href="{reset_url}" style="color: #059669;">{reset_url}</a>
    </p>
</div>
"""
    return MailMessage(
        to=to,
        subject=f"Password Recovery - {app_name}",
        html_body=html_body,
    )
