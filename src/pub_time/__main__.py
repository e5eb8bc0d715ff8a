from pub_time.cli.app import main

main()
