from bfi.main import main

main()
