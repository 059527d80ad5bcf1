"""Editor-side build entry point and PlayerSettings argument mapping."""
