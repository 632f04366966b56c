from tsmatch.utils.math_utils import pdf, cdf, inverse_cdf
from tsmatch.utils.data_utils import ratings_to_frame, ratings_from_frame
