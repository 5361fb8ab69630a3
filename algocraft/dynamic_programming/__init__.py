"""Matrix chain multiplication and Kadane's maximum subarray."""