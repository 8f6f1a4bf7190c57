from mobbuild.cli import main

main()
