from number_words import number_to_words

EXAMPLE_VALUE = 10_021


def main():
    print(number_to_words(EXAMPLE_VALUE))


if __name__ == "__main__":
    main()
