from kaggle_mcp.api.server import main

main()
