import os
import sys

from jsonrpc_proxy import JsonRpcError, RpcProxy, setup_logger

# Simple JSON-RPC client.
# Usage:
#   JSONRPC_URL=http://localhost:1080 python basic_client.py

RPC_URL = os.environ.get("JSONRPC_URL", "http://localhost:1080")


def main():
    setup_logger(os.environ.get("JSONRPC_LOG_LEVEL", "INFO"))

    # Long-running server methods need a larger timeout than the default
    proxy = RpcProxy(RPC_URL, timeout=10)
    print("RPC:", proxy.url)

    try:
        # Requires a server that supports introspection
        methods = proxy.system.listMethods()
        print("system.listMethods():", methods)
        if "system.methodHelp" in methods:
            print("system.methodHelp('system.listMethods'):",
                  proxy.system.methodHelp("system.listMethods"))
    except JsonRpcError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
