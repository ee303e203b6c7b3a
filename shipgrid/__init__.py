"""Fixed-fleet ship placement on a text-rendered grid."""
