"""Allow ``python -m kubeutil``."""

from kubeutil.main import app

if __name__ == "__main__":
    app()
