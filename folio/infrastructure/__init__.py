"""Infrastructure: Firestore REST access and content repositories."""
