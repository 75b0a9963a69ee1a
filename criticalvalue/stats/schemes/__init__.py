"""
Test-family derivations.

Each module turns one kind of input (summary statistics or a test statistic)
into the critical values of one family of tests:

- `one_sample`: one-sample t-test
- `two_sample`: independent two-sample t-test (Student and Welch)
- `paired`: paired-samples t-test
- `correlation`: Pearson correlation, t or Fisher z method
- `coefficient`: regression coefficients, t or z method
"""
