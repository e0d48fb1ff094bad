"""User interfaces for tagsort."""
