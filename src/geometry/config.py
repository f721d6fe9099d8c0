# Diagnostic line written by geometry.renderer.render (one per draw call)
RENDER_MESSAGE = "rendering"
# Prefix for summary lines printed by `python -m geometry`
LOG_TAG = "[Geometry]"
# Demo entry point: measure the distance between these two coordinates
DEMO_POINTS = ((0.0, 0.0), (3.0, 4.0))
