from model_bridge.server import create_app

# Settings come from .env, config/model_mapping.yaml and the environment
app = create_app()
