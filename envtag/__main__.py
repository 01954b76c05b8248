from envtag.cli.app import main

main()
