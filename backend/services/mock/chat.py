from prompts.chat import CHAT_GREETING


def mock_chat_reply(user_message: str) -> str:
    """Generate a canned assistant reply from keywords in the user's message"""
    text_lower = user_message.lower()

    if 'late' in text_lower and 'rent' in text_lower:
        return "Send a written late-rent notice as soon as the grace period in the lease ends, and apply only the late fee the lease allows. Keep a copy for your records."
    if 'deposit' in text_lower:
        return "Hold the security deposit as your state requires and return it, with an itemized list of any deductions, within the state's deadline after move-out."
    if 'maintenance' in text_lower or 'repair' in text_lower:
        return "Log each maintenance request with a date, respond to urgent issues (no heat, water leaks, electrical hazards) right away, and give tenants notice before entering."
    if 'evict' in text_lower:
        return "Evictions must go through the courts. Serve the notice your state requires, then file with the local court if the issue is not resolved."
    if 'lease' in text_lower or 'clause' in text_lower:
        return "You can draft clauses on the lease page and run a state legal review on them before sending the lease to your tenant."
    if 'tenant' in text_lower or 'screen' in text_lower:
        return "Apply the same written screening criteria to every applicant (income, rental history, references) to stay within fair housing rules."
    return CHAT_GREETING
