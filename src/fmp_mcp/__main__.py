from fmp_mcp.server import main

main()
