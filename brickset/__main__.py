from brickset.main import main

main()
