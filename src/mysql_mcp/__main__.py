from mysql_mcp.cli import main

main()
