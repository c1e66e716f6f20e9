from postbuild.cli import main

main()
