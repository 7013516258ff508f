"""Request pipeline: middleware stages, route gates and response shaping."""
