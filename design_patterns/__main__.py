from design_patterns.cli.main import main

main()
