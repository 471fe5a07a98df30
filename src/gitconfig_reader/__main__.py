from .git_config import main

main()
