"""Example templates and data used by the demo runner"""
import copy
from typing import Any, Dict

from utils.latex import escape

SYNC_TEMPLATE = r"\documentclass{article}\begin{document}Hello, [[.Who]]!\end{document}"
SYNC_DATA = {"Who": "sync world"}

SIMPLE_TEMPLATE = r"""\documentclass{article}\begin{document}\title{ [[.Title]] }\author{ [[.Author]] }\maketitle

[[.Content]] \end{document}"""

SIMPLE_DATA = {
    "Title": "My First PDF",
    "Author": "Python Client",
    "Content": "This PDF was generated using the LaTeX Lite API!",
}

INVOICE_TEMPLATE = r"""\documentclass{article}
\usepackage[margin=1in]{geometry}
\begin{document}
\begin{center}{\Large \textbf{INVOICE}}\end{center}
\vspace{1em}

\noindent\textbf{Invoice \#:} [[.InvoiceNumber]] \\
\textbf{Date:} [[.Date]]

\vspace{1em}
\noindent\textbf{Bill To:} \\
[[.CustomerName]] \\
[[.CustomerAddress]]

\vspace{2em}

% --- Table starts here ---
\vspace{1em}
\begin{tabular}{|p{8cm}|r|}
\hline
\textbf{Description} & \textbf{Amount} \\
\hline
[[range .Items]] [[.Description]] & \$[[.Amount]] \\
\hline
[[end]]
\textbf{Total:} & \textbf{\$[[.Total]]} \\
\hline
\end{tabular}
\vspace{2em}
% --- Table ends here ---

\vspace{2em}

\noindent Thank you for your business!

\end{document}"""

INVOICE_DATA = {
    "InvoiceNumber": "INV-PY-001",
    "Date": "December 14, 2025",
    "CustomerName": "Tech Startup Inc",
    "CustomerAddress": r"456 Innovation Drive\\San Francisco, CA 94105",
    "Items": [
        {"Description": "LaTeX API Integration", "Amount": "1500.00"},
        {"Description": "Custom Templates", "Amount": "800.00"},
        {"Description": "Support & Training", "Amount": "700.00"},
    ],
    "Total": "3000.00",
}


def invoice_data() -> Dict[str, Any]:
    """Invoice data with item descriptions escaped for LaTeX"""
    data = copy.deepcopy(INVOICE_DATA)
    for item in data["Items"]:
        item["Description"] = escape(item["Description"])
    return data
