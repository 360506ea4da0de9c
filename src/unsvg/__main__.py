from unsvg.cli.main import main

main()
