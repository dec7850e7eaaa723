# server.py (repo root)
from gamma_mcp.main import main

# Local run over stdio: python server.py [--api-key ...]
if __name__ == "__main__":
    main()
