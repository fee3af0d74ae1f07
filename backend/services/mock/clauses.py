import re

_CLAUSE_MARKER = "LEASE CLAUSES:"
_STATE_PATTERN = re.compile(r"legal and enforceable in (.+?)\.\s*$", re.MULTILINE)


def _clause_section(prompt: str) -> str:
    return prompt.split(_CLAUSE_MARKER, 1)[-1].strip()


def _tidy_clause(clause: str) -> str:
    tidy = " ".join(clause.split())
    tidy = tidy[0].upper() + tidy[1:]
    if tidy[-1] not in ".!?":
        tidy += "."
    return tidy


def mock_rewrite_response(prompt: str) -> str:
    """Generate a mock numbered clause list, with the chatter a real model adds"""
    clauses = [c for c in re.split(r"\n\s*\n", _clause_section(prompt)) if c.strip()]

    lines = ["Here are the rewritten clauses:", ""]
    for i, clause in enumerate(clauses, start=1):
        lines.append(f"{i}. {_tidy_clause(clause)}")
    lines.append("")
    lines.append("Let me know if you would like any further changes.")
    return "\n".join(lines)


def mock_legal_review(prompt: str) -> str:
    """Generate a mock legal review for testing"""
    match = _STATE_PATTERN.search(prompt)
    state = match.group(1) if match else "the selected state"
    clauses = [c for c in _clause_section(prompt).split("\n\n") if c.strip()]

    notes = []
    for i, clause in enumerate(clauses, start=1):
        text_lower = clause.lower()
        if 'deposit' in text_lower:
            notes.append(f"Clause {i}: Potentially problematic. {state} caps security deposits and sets a deadline for returning them. Confirm the amount and return period match state law.")
        elif 'late fee' in text_lower or 'late charge' in text_lower:
            notes.append(f"Clause {i}: Potentially problematic. Late fees must be reasonable in {state}; a grace period and a fixed cap are the safest approach.")
        elif 'enter' in text_lower or 'entry' in text_lower or 'access' in text_lower:
            notes.append(f"Clause {i}: Compliant if advance notice is given. {state} generally requires reasonable notice before non-emergency entry.")
        elif 'evict' in text_lower or 'lock' in text_lower or ('utilities' in text_lower and 'shut' in text_lower):
            notes.append(f"Clause {i}: Likely unenforceable. Self-help eviction (lockouts, utility shutoffs) is prohibited; use the court eviction process in {state}.")
        elif 'waive' in text_lower or 'not be liable' in text_lower or 'not responsible' in text_lower:
            notes.append(f"Clause {i}: Likely unenforceable. Tenants in {state} cannot waive the warranty of habitability or the landlord's liability for negligence.")
        elif 'pet' in text_lower:
            notes.append(f"Clause {i}: Compliant. Pet restrictions are allowed, but assistance animals must be accommodated under fair housing law.")
        else:
            notes.append(f"Clause {i}: Compliant. No conflict with {state} landlord-tenant law was identified.")

    if not notes:
        notes.append("No clauses were provided for review.")

    return (
        f"Legal review for {state} (mock analysis, not legal advice):\n\n"
        + "\n\n".join(notes)
        + "\n\nHave a licensed attorney in the state confirm these findings before using the lease."
    )
