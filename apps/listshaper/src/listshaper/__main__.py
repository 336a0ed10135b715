from .cli import main

# All error handling lives in cli.main() so `python -m listshaper` and the
# installed `listshaper` script share one code path.
if __name__ == "__main__":
    main()
