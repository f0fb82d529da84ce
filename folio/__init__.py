"""folio: portfolio content store backed by the Firestore REST API."""
