"""Confirmation email content for new waitlist contacts."""


def create_confirmation_email_html() -> str:
    """Create HTML body for the waitlist confirmation email.

    The body is identical for every recipient; the message is only addressed,
    never personalized.
    """

    return """<!DOCTYPE html>
<html lang="fr">
<head><meta charset="UTF-8"></head>
<body style="margin:0;padding:0;background-color:#f4f4f7;font-family:Arial,Helvetica,sans-serif;">
  <table role="presentation" width="100%" cellpadding="0" cellspacing="0" style="background-color:#f4f4f7;padding:40px 0;">
    <tr>
      <td align="center">
        <table role="presentation" width="600" cellpadding="0" cellspacing="0" style="max-width:600px;width:100%;background-color:#ffffff;border-radius:12px;overflow:hidden;">
          <tr>
            <td style="background-color:#6366F1;padding:32px 40px;text-align:center;">
              <span style="font-size:28px;font-weight:bold;color:#ffffff;letter-spacing:-0.5px;">Flexo</span>
            </td>
          </tr>
          <tr>
            <td style="padding:40px 40px 32px;">
              <h1 style="margin:0 0 24px;font-size:24px;color:#1a1a2e;line-height:1.3;">Bienvenue sur la liste !</h1>
              <p style="margin:0 0 16px;font-size:16px;color:#4a4a68;line-height:1.6;">
                C'est confirmé : tu fais maintenant partie des premiers freelances à rejoindre Flexo. Merci pour ta confiance, ça compte énormément pour nous.
              </p>
              <p style="margin:0 0 16px;font-size:16px;color:#4a4a68;line-height:1.6;">
                Fini les relances manuelles et les impayés qui traînent. Flexo automatise tout : de la création de facture jusqu'à l'escalade juridique si nécessaire.
              </p>
              <p style="margin:0 0 16px;font-size:16px;color:#4a4a68;line-height:1.6;font-weight:600;">
                Et maintenant ?
              </p>
              <p style="margin:0 0 24px;font-size:16px;color:#4a4a68;line-height:1.6;">
                On te prévient en avant-première dès que l'accès est ouvert. Les 500 premiers inscrits bénéficient du prix bloqué à vie — et tu en fais partie.
              </p>
              <p style="margin:0;font-size:16px;color:#4a4a68;line-height:1.6;">À très vite,</p>
              <p style="margin:4px 0 0;font-size:16px;color:#1a1a2e;font-weight:bold;">— L'équipe Flexo</p>
            </td>
          </tr>
          <tr>
            <td style="padding:24px 40px 32px;border-top:1px solid #e5e5eb;">
              <p style="margin:0;font-size:13px;color:#9ca3af;text-align:center;line-height:1.5;">
                Le seul outil de facturation qui va au tribunal pour récupérer ton argent.
              </p>
              <p style="margin:8px 0 0;font-size:12px;color:#c4c4cc;text-align:center;">
                © 2025 Flexo — Tous droits réservés
              </p>
            </td>
          </tr>
        </table>
      </td>
    </tr>
  </table>
</body>
</html>"""
