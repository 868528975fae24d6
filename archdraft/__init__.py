"""Document summaries and architecture drafts from uploaded business documents."""
