# Built-in curated table of standard fraction/percent pairs.
# Used when no data/fractions shard or fractions.json is present.
# Percents are exact: whole part plus a reduced proper fraction.

FRACTION_DATA = [
    {"fraction": r"\frac{1}{2}", "percent": r"50\%"},
    {"fraction": r"\frac{1}{3}", "percent": r"33\frac{1}{3}\%"},
    {"fraction": r"\frac{2}{3}", "percent": r"66\frac{2}{3}\%"},
    {"fraction": r"\frac{1}{4}", "percent": r"25\%"},
    {"fraction": r"\frac{3}{4}", "percent": r"75\%"},
    {"fraction": r"\frac{1}{5}", "percent": r"20\%"},
    {"fraction": r"\frac{2}{5}", "percent": r"40\%"},
    {"fraction": r"\frac{3}{5}", "percent": r"60\%"},
    {"fraction": r"\frac{4}{5}", "percent": r"80\%"},
    {"fraction": r"\frac{1}{6}", "percent": r"16\frac{2}{3}\%"},
    {"fraction": r"\frac{5}{6}", "percent": r"83\frac{1}{3}\%"},
    {"fraction": r"\frac{1}{7}", "percent": r"14\frac{2}{7}\%"},
    {"fraction": r"\frac{2}{7}", "percent": r"28\frac{4}{7}\%"},
    {"fraction": r"\frac{3}{7}", "percent": r"42\frac{6}{7}\%"},
    {"fraction": r"\frac{4}{7}", "percent": r"57\frac{1}{7}\%"},
    {"fraction": r"\frac{5}{7}", "percent": r"71\frac{3}{7}\%"},
    {"fraction": r"\frac{6}{7}", "percent": r"85\frac{5}{7}\%"},
    {"fraction": r"\frac{1}{8}", "percent": r"12\frac{1}{2}\%"},
    {"fraction": r"\frac{3}{8}", "percent": r"37\frac{1}{2}\%"},
    {"fraction": r"\frac{5}{8}", "percent": r"62\frac{1}{2}\%"},
    {"fraction": r"\frac{7}{8}", "percent": r"87\frac{1}{2}\%"},
    {"fraction": r"\frac{1}{9}", "percent": r"11\frac{1}{9}\%"},
    {"fraction": r"\frac{2}{9}", "percent": r"22\frac{2}{9}\%"},
    {"fraction": r"\frac{4}{9}", "percent": r"44\frac{4}{9}\%"},
    {"fraction": r"\frac{5}{9}", "percent": r"55\frac{5}{9}\%"},
    {"fraction": r"\frac{7}{9}", "percent": r"77\frac{7}{9}\%"},
    {"fraction": r"\frac{8}{9}", "percent": r"88\frac{8}{9}\%"},
    {"fraction": r"\frac{1}{10}", "percent": r"10\%"},
    {"fraction": r"\frac{3}{10}", "percent": r"30\%"},
    {"fraction": r"\frac{7}{10}", "percent": r"70\%"},
    {"fraction": r"\frac{9}{10}", "percent": r"90\%"},
    {"fraction": r"\frac{1}{11}", "percent": r"9\frac{1}{11}\%"},
    {"fraction": r"\frac{2}{11}", "percent": r"18\frac{2}{11}\%"},
    {"fraction": r"\frac{3}{11}", "percent": r"27\frac{3}{11}\%"},
    {"fraction": r"\frac{1}{12}", "percent": r"8\frac{1}{3}\%"},
    {"fraction": r"\frac{5}{12}", "percent": r"41\frac{2}{3}\%"},
    {"fraction": r"\frac{7}{12}", "percent": r"58\frac{1}{3}\%"},
    {"fraction": r"\frac{11}{12}", "percent": r"91\frac{2}{3}\%"},
    {"fraction": r"\frac{1}{13}", "percent": r"7\frac{9}{13}\%"},
    {"fraction": r"\frac{1}{14}", "percent": r"7\frac{1}{7}\%"},
    {"fraction": r"\frac{1}{15}", "percent": r"6\frac{2}{3}\%"},
    {"fraction": r"\frac{2}{15}", "percent": r"13\frac{1}{3}\%"},
    {"fraction": r"\frac{1}{16}", "percent": r"6\frac{1}{4}\%"},
    {"fraction": r"\frac{3}{16}", "percent": r"18\frac{3}{4}\%"},
    {"fraction": r"\frac{1}{20}", "percent": r"5\%"},
    {"fraction": r"\frac{3}{20}", "percent": r"15\%"},
    {"fraction": r"\frac{1}{25}", "percent": r"4\%"},
    {"fraction": r"\frac{1}{40}", "percent": r"2\frac{1}{2}\%"},
]
