"""Click plumbing shared by the endzeit command: base class and context."""
