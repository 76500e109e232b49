"""Archive-driven job synthesis engine."""
