"""Movie metadata and user favorites API."""
