from flake_soak.main import entrypoint

entrypoint()
