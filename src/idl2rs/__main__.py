from idl2rs.cli.app import main

main()
