#!/usr/bin/env python
import pseudopseudo



if __name__ == "__main__":
    pseudopseudo.main()
