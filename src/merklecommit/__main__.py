from merklecommit.cli.main import main

main()
