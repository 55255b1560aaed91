from configpaths.cli import main

main()
