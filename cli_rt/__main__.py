from cli_rt.cli import main

main()
