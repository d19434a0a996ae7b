from border_blaster.main import main

main()
