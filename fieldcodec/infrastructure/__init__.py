"""Infrastructure layer: Firestore store client and store-side converters."""
