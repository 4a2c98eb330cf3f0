"""Image gallery server: paginated, searchable listing of an image folder."""
